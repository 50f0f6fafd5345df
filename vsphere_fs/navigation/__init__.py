"""
Inventory Navigation

Modules:
    navigator: Path resolution (Navigator, split_path)
    lister: Batched summary rendering of sibling nodes (Lister)

Data flow:
    Navigator.resolve(root, path) -> node
    Navigator.children(node) -> {name: node}
    Lister.list(children) -> [ListingLine]
"""

from vsphere_fs.navigation.lister import Lister
from vsphere_fs.navigation.navigator import Navigator, split_path

__all__ = ["Lister", "Navigator", "split_path"]
