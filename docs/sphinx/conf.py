# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for LUML documentation."""

project = "LUML"
author = "LUML Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
