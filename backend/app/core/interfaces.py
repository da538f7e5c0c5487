from abc import ABC, abstractmethod
from dataclasses import dataclass

@dataclass
class MediaHostConfig:
    """Configuration class for the media host (Cloudinary)"""
    cloud_name: str
    api_key: str
    api_secret: str
    folder: str = "movies"
    # compression and format negotiation requested from the host
    quality: str = "auto:good"
    fetch_format: str = "auto"
    flags: str = "lossy"
    timeout: int = 120

@dataclass
class UploadResult:
    """Stored image as reported by the media host"""
    url: str
    public_id: str

class MediaHostError(Exception):
    """Custom exception for media host errors"""
    def __init__(self, message: str, status_code: int = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class MediaClientInterface(ABC):
    """Abstract interface for media host client"""

    @abstractmethod
    def upload(self, data: bytes, filename: str = "poster", content_type: str = "application/octet-stream") -> UploadResult:
        pass

    @abstractmethod
    def destroy(self, public_id: str) -> bool:
        pass
