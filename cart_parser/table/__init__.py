from .reader import CartFileError, RawTable, read_cart_file, split_cells, split_table

__all__ = [
    "CartFileError",
    "RawTable",
    "read_cart_file",
    "split_cells",
    "split_table",
]
