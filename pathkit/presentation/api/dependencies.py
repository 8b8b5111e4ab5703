"""
Dependency Injection Configuration.

This module wires the concrete filesystem service and settings into the
path use cases.
"""

from typing import Annotated

from fastapi import Depends

from pathkit.infrastructure.config.settings import Settings, get_settings
from pathkit.infrastructure.filesystem.directory_service import DirectoryService
from pathkit.application.interfaces.i_directory_service import IDirectoryService
from pathkit.application.use_cases.inspect_path import InspectPathUseCase
from pathkit.application.use_cases.transform_path import TransformPathUseCase


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Directory Service
def get_directory_service(settings: SettingsDep) -> IDirectoryService:
    return DirectoryService(mode=settings.directory_mode)


DirectoryServiceDep = Annotated[IDirectoryService, Depends(get_directory_service)]


# Use Cases
def get_inspect_use_case(settings: SettingsDep) -> InspectPathUseCase:
    return InspectPathUseCase(default_separator=settings.dir_separator)


InspectUseCaseDep = Annotated[InspectPathUseCase, Depends(get_inspect_use_case)]


def get_transform_use_case(
    directory_service: DirectoryServiceDep,
    settings: SettingsDep,
) -> TransformPathUseCase:
    return TransformPathUseCase(
        directory_service=directory_service,
        default_separator=settings.dir_separator,
    )


TransformUseCaseDep = Annotated[TransformPathUseCase, Depends(get_transform_use_case)]
