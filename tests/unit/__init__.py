"""
PySATL Calc unit tests
======================

Tests of the distribution catalogue, the expression engine and the CLI.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
