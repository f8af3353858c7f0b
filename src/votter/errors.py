"""Errors raised by the scan, build and write steps.

Each error knows the process exit code it maps to; only ``votter.cli.main``
turns them into an exit.
"""
from __future__ import annotations

from votter import config


class VotterError(Exception):
    exit_code: int

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "exit_code" not in cls.__dict__:
            raise TypeError(f"{cls.__name__} must set exit_code")


class ImagesFolderNotFoundError(VotterError):
    exit_code = config.EXIT_IMAGES_FOLDER_NOT_FOUND


class AnnotationsFolderNotFoundError(VotterError):
    exit_code = config.EXIT_ANNOTATIONS_FOLDER_NOT_FOUND


class ImagesFolderEmptyError(VotterError):
    exit_code = config.EXIT_IMAGES_FOLDER_EMPTY


class ScanError(VotterError):
    exit_code = config.EXIT_IMAGES_FOLDER_EMPTY


class AssetBuildError(VotterError):
    exit_code = config.EXIT_IMAGES_FOLDER_EMPTY


class AnnotationsWriteError(VotterError):
    exit_code = config.EXIT_IMAGES_FOLDER_NOT_FOUND
