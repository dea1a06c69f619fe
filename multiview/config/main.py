# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from pydantic import Field

from ..collections.traversable.config import CollectionConfig
from ..util.config.models import ConfigBase


# MARK: Main Config
class Config(ConfigBase):
    collection: CollectionConfig = Field(default_factory=CollectionConfig, description="Default behaviour of traversable collections")
