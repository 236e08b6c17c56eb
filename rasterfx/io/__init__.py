from .image_io import read_image, write_image, output_path

__all__ = ["read_image", "write_image", "output_path"]
