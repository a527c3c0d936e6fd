# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for LUML."""
