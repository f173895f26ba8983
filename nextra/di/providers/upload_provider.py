from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.uploads.photo_storage import PhotoStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UploadProvider:
    """Upload provider - registers the photo storage shared by user use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(PhotoStorage, PhotoStorage(container.get(Settings)))
