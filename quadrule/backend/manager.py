
from typing import Dict, Optional
import importlib
import threading

from .. import logger
from .base import BackendProxy


class BackendManager():
    """Per-thread selection of the array backend used to build rules."""
    def __init__(self, *, default_backend: Optional[str]=None):
        self._backends: Dict[str, BackendProxy] = {}
        self._THREAD_LOCAL = threading.local()
        self._default_backend_name = default_backend

    def set_backend(self, name: str) -> None:
        if name not in self._backends:
            self._backends[name] = self._load_backend(name)
        self._THREAD_LOCAL.backend = self._backends[name]

    @staticmethod
    def _load_backend(name: str) -> BackendProxy:
        if name not in BackendProxy._available_backends:
            try:
                importlib.import_module(f"quadrule.backend.{name}_backend")
            except ImportError:
                raise RuntimeError(f"Backend '{name}' is not found.")
        if name not in BackendProxy._available_backends:
            raise RuntimeError(f"Failed to load backend '{name}'.")
        logger.info(f"Backend '{name}' loaded.")
        return BackendProxy._available_backends[name]()

    def get_current_backend(self) -> BackendProxy:
        backend = getattr(self._THREAD_LOCAL, 'backend', None)
        if backend is None:
            if self._default_backend_name is None:
                raise RuntimeError("No backend was set and the backend manager "
                                   "has no default backend.")
            self.set_backend(self._default_backend_name)
            backend = self._THREAD_LOCAL.backend
        return backend

    def __getattr__(self, item):
        return getattr(self.get_current_backend(), item)
