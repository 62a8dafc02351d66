# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for yangkit documentation."""

project = "yangkit"
author = "yangkit Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
