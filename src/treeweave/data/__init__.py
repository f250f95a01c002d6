from .file_io import load_tree, node_records, save_nodes, tree_from_dict

__all__ = ["load_tree", "tree_from_dict", "node_records", "save_nodes"]
