"""
Docker Helper Exceptions
"""

from typing import Optional


class DockerException(Exception):
    """Base Docker exception"""
    pass


class DockerConnectionError(DockerException):
    """Socket could not be reached or the response could not be read"""
    pass


class APIError(DockerException):
    """Docker API error"""
    
    def __init__(self, message: str, path: Optional[str] = None,
                 status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.status_code = status_code
        self.body = body


class ResponseParseError(DockerException):
    """Response body is not the JSON we expected"""
    
    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class ContainerNotFound(DockerException):
    """Container not found"""
    pass


class NetworkNotFound(DockerException):
    """Network not found"""
    pass
