# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """One file on disk, holding a `T` in some text format."""

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = filename
        self._codec = encoding

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec or "default encoding"})'
