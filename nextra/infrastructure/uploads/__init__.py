from .photo_storage import PhotoStorage, safe_basename

__all__ = ["PhotoStorage", "safe_basename"]
