# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""yangkit: semantic YANG schema model and printer."""

from yangkit.printer import PrinterError, dumps, print_module

__all__ = [
    "PrinterError",
    "dumps",
    "print_module",
]
