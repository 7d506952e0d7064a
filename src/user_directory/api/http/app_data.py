from dataclasses import dataclass

from user_directory.core.services import UserDirectoryService
from user_directory.core.store import DirectoryStore
from user_directory.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    store: DirectoryStore
    user_directory_service: UserDirectoryService
