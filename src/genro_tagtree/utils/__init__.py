# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Internal utilities."""

from .logger import get_logger

__all__ = ["get_logger"]
