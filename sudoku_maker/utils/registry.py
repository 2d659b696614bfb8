import importlib
import traceback
from typing import Any, Dict, Optional, Type

from sudoku_maker.utils.log import get_logger


class Registry(object):
    """A name -> class mapping with lazily imported defaults."""

    def __init__(self, name: str, default_mapping: Optional[Dict[str, str]] = None):
        """
        Args:
            name (`str`): The name of the registry.
            default_mapping (`dict`): Keys mapped to dotted class paths, imported on first `get`.
        """
        self._name = name
        self._modules: Dict[str, Type] = {}
        self._default_mapping = dict(default_mapping or {})
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> dict:
        """Classes registered or imported so far."""
        return self._modules

    def keys(self):
        return sorted(set(self._modules) | set(self._default_mapping))

    def __contains__(self, module_key) -> bool:
        return module_key in self._modules or module_key in self._default_mapping

    def get(self, module_key) -> Any:
        """
        Get the class registered as `module_key`.

        Lookup order: registered classes, then the default mapping, then
        `module_key` itself read as a dotted `package.module.ClassName` path.

        Args:
            module_key (`str`): Registered key or dotted class path.

        Returns:
            `Any`: the class, or None when `module_key` is None.
        """
        module = self._modules.get(module_key, None)
        if module is not None:
            return module
        if module_key is None:
            self.logger.info("Empty module key, return None")
            return None
        if module_key in self._default_mapping:
            module = self._import(self._default_mapping[module_key])
        elif isinstance(module_key, str) and "." in module_key:
            module = self._import(module_key)
        else:
            raise ValueError(
                f"Invalid module key: {module_key}, expected one of {self.keys()} in {self._name}"
            )
        self._register_module(module_name=module_key, module_cls=module)
        return module

    def _import(self, class_path: str) -> Type:
        module_path, class_name = class_path.rsplit(".", 1)
        try:
            return getattr(importlib.import_module(module_path), class_name)
        except Exception:
            self.logger.error(
                f"Failed to dynamically import {class_name} from {module_path}:\n"
                + traceback.format_exc()
            )
            raise ImportError(f"Cannot dynamically import {class_name} from {module_path}")

    def _register_module(self, module_name=None, module_cls=None, force=False):
        if module_name is None:
            module_name = module_cls.__name__

        if module_name in self._modules and not force:
            self.logger.warning(
                f"{module_name} is already registered in {self._name}, "
                f"if you want to override it, please set force=True."
            )
            raise KeyError(f"{module_name} is already registered in {self._name}")

        self._modules[module_name] = module_cls
        module_cls._name = module_name

    def register_module(self, module_name: Optional[str] = None, module_cls: Type = None, force=False):
        """
        Register a class under `module_name`, directly or as a decorator.

        Example:

            .. code-block:: python

                @RENDERERS.register_module("markdown")
                class MarkdownRenderer(Renderer):
                    ...
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str, got {type(module_name)}")
        if module_cls is not None:
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        return _register
