# -*- coding: utf-8 -*-
"""Minecraft 皮肤 / 披风材质服务"""

__version__ = "0.1.0"
