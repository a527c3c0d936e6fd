# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""LUML: UML class diagrams from S-expression declarations."""

__version__ = "0.1.0"
