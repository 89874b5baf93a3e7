from .resize_to_fit import resize_to_fit, target_dimensions

__all__ = ["resize_to_fit", "target_dimensions"]
