"""
Docker Images API
"""

import logging
from typing import List

from . import endpoints
from .models import ImageDescriptor, parse_list

logger = logging.getLogger(__name__)


class ImageCollection:
    """Docker Images collection"""
    
    def __init__(self, client):
        self.client = client
    
    def pull(self, image_name: str):
        """
        Pull image from registry
        
        The progress stream in the response body is ignored.
        
        Args:
            image_name: Full image name in the form image:version
        """
        self.client.http.send(endpoints.pull_image(image_name))
        logger.info(f"Image {image_name} pulled")
    
    def find(self, reference: str) -> List[ImageDescriptor]:
        """
        Find local images matching a reference
        
        Args:
            reference: Image reference in the form image:version
            
        Returns:
            List of ImageDescriptor objects (empty if the image is absent)
        """
        text = self.client.http.send(endpoints.find_images(reference))
        return parse_list(text, ImageDescriptor.from_dict, 'find_images')
