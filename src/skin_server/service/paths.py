# -*- coding: utf-8 -*-
"""
统一的路径管理服务。

文件功能:
    - 集中管理本地材质目录布局: <assets_dir>/skins 与 <assets_dir>/cloaks。

公开接口:
    - get_assets_dir(assets_dir): 获取材质根目录（相对路径基于当前工作目录）。
    - get_asset_kind_dir(assets_dir, kind): 获取某一资源类型的目录。
"""

from pathlib import Path

from ..schemas import AssetKind


def get_assets_dir(assets_dir: str = "assets") -> Path:
    """获取材质根目录。相对路径以进程工作目录为基准。"""
    path = Path(assets_dir)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def get_asset_kind_dir(assets_dir: str, kind: AssetKind) -> Path:
    """获取皮肤或披风所在目录"""
    return get_assets_dir(assets_dir) / kind.subdirectory
