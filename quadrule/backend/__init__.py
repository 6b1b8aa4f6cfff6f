"""
QuadRule Backends
=================

This module provides the array backend manager used by the quadrature rules.

"""
from .manager import BackendManager
from .base import TensorLike, Size, Number

backend_manager = BackendManager(default_backend='numpy')
bm = backend_manager
