# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from pydantic import Field

from ...util.config.base_model import BaseConfigModel
from .order import TraversalOrder


class CollectionConfig(BaseConfigModel):
    default_order: TraversalOrder = Field(
        default=TraversalOrder.ALPHABETIC, description="Order used when a traversal is requested without an explicit order, and when iterating a collection"
    )
    warn_unreleased: bool = Field(default=True, description="Log a warning when a traversal is garbage collected without having been released")
