"""
Campus API Backend: Controllers
=================================

One generic ResourceController (resource.py) and the four descriptors that
specialize it (resources.py).
"""

from campus_api.controllers.resource import ResourceController, ResourceDescriptor

__all__ = ["ResourceController", "ResourceDescriptor"]
