# Path: fin_ratio/core/__init__.py
"""
fin_ratio Core Package

Core utilities for the ratio analysis tool.

Submodules:
    - logger: IPO-aware logging system
    - ui: Interactive category selection and field prompts
"""
