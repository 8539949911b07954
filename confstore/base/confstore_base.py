"""Base class giving confstore classes a shared, lazily created logger."""

from confstore.logging.logger import get_logger


class ConfStoreMeta(type):
    """Metaclass for ConfStoreBase.

    The metaclass lets classes deriving from ConfStoreBase use the same default logger within class methods as
    within instance methods::

        from confstore.base import ConfStoreBase

        class MyLoader(ConfStoreBase):
            def instance_method(self):
                self.logger.info(f"Using logger: {self.logger.name}")  # confstore.my_module.MyLoader

            @classmethod
            def class_method(cls):
                cls.logger.info(f"Using logger: {cls.logger.name}")  # confstore.my_module.MyLoader
    """

    def __init__(cls, name, bases, attr_dict):
        super().__init__(name, bases, attr_dict)
        cls._logger = None

    @property
    def logger(cls):
        if cls._logger is None:
            cls._logger = get_logger(cls.unique_name)
        return cls._logger

    @logger.setter
    def logger(cls, new_logger):
        cls._logger = new_logger

    @property
    def unique_name(cls) -> str:
        return cls.__module__ + "." + cls.__name__


class ConfStoreBase(metaclass=ConfStoreMeta):
    """Mixin exposing the class-level logger on instances as ``self.logger``."""

    @property
    def logger(self):
        return type(self).logger

    @property
    def unique_name(self) -> str:
        return type(self).unique_name
