from .helper import delete_path, path_exists, path_size, size_string

__all__ = ["delete_path", "path_exists", "path_size", "size_string"]
