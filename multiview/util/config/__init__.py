# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Configuration infrastructure: pydantic base models, YAML loading and the configuration manager.

Submodules are imported directly (e.g. ``from multiview.util.config.wrapper import ConfigManager``), as the
logging configuration models depend on :mod:`.base_model` while the loader depends on the logging manager.
"""
