# -*- coding: utf-8 -*-
"""
Customer Desk Application Core Module
"""

from .config import Config
from .main_window import MainWindow
from .styles import get_stylesheet

__all__ = ["Config", "MainWindow", "get_stylesheet"]
