# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for cdparse documentation."""

project = "cdparse"
author = "cdparse Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
