# -*- coding: utf-8 -*-
"""
Application stylesheet for PyQt5.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet."""
    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        font-family: "Segoe UI", "Noto Sans", sans-serif;
        font-size: 10pt;
        color: {Config.TEXT_COLOR};
    }}

    QMainWindow, QStackedWidget {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    /* ===== Sidebar ===== */
    #sidebar {{
        background-color: {Config.SIDEBAR_BG};
        border: none;
    }}

    #sidebar QLabel {{
        color: white;
        background: transparent;
    }}

    #sidebar-title {{
        font-size: 15pt;
        font-weight: 600;
        padding: 24px 16px 8px 16px;
    }}

    #sidebar-status, #sidebar-version {{
        font-size: 9pt;
        padding: 4px 16px;
    }}

    #sidebar QPushButton#nav-button {{
        background-color: transparent;
        color: rgba(255, 255, 255, 0.85);
        border: none;
        text-align: left;
        padding: 14px 20px;
        font-weight: 500;
        border-radius: 0;
        border-left: 3px solid transparent;
    }}

    #sidebar QPushButton#nav-button:hover {{
        background-color: rgba(255, 255, 255, 0.08);
        color: white;
    }}

    #sidebar QPushButton#nav-button:checked {{
        background-color: {Config.SIDEBAR_ACTIVE};
        border-left: 3px solid white;
        color: white;
    }}

    /* ===== Headers ===== */
    QLabel#page-title {{
        font-size: 18pt;
        font-weight: 700;
    }}

    QLabel#card-title {{
        font-size: 12pt;
        font-weight: 600;
    }}

    QLabel#hint-label, QLabel#empty-description {{
        color: {Config.TEXT_LIGHT};
    }}

    QLabel#empty-title {{
        font-size: 13pt;
        font-weight: 600;
    }}

    #wizard-header, #wizard-footer {{
        background-color: {Config.CARD_BACKGROUND};
    }}

    QFrame#separator {{
        background-color: {Config.BORDER_COLOR};
    }}

    /* ===== Cards ===== */
    QFrame#card {{
        background-color: {Config.CARD_BACKGROUND};
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 8px;
    }}

    /* ===== Buttons ===== */
    QPushButton {{
        background-color: {Config.CARD_BACKGROUND};
        color: {Config.PRIMARY_COLOR};
        border: 1px solid {Config.PRIMARY_COLOR};
        border-radius: 4px;
        padding: 6px 14px;
        min-height: 28px;
    }}

    QPushButton:hover {{
        background-color: #E3F2FD;
    }}

    QPushButton#primary-button {{
        background-color: {Config.PRIMARY_COLOR};
        color: white;
        border: none;
    }}

    QPushButton#primary-button:hover {{
        background-color: {Config.PRIMARY_DARK};
    }}

    QPushButton#danger-button {{
        color: {Config.ERROR_COLOR};
        border: 1px solid {Config.ERROR_COLOR};
    }}

    QPushButton:disabled {{
        background-color: #E0E0E0;
        color: #9E9E9E;
        border: none;
    }}

    /* ===== Inputs ===== */
    QLineEdit, QComboBox {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 4px;
        padding: 6px 10px;
        min-height: 24px;
    }}

    QLineEdit:focus, QComboBox:focus {{
        border: 1px solid {Config.PRIMARY_COLOR};
    }}

    QLineEdit[variant="error"] {{
        border: 1px solid {Config.ERROR_COLOR};
    }}

    QLabel#field-label {{
        font-weight: 500;
    }}

    QLabel#field-error {{
        color: {Config.ERROR_COLOR};
        font-size: 9pt;
    }}

    /* ===== Tables ===== */
    QTableView {{
        background-color: white;
        alternate-background-color: #FAFBFC;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 8px;
        selection-background-color: #E3F2FD;
        selection-color: {Config.TEXT_COLOR};
    }}

    QHeaderView::section {{
        background-color: #F8FAFC;
        color: {Config.TEXT_LIGHT};
        font-weight: 600;
        padding: 8px;
        border: none;
        border-bottom: 1px solid {Config.BORDER_COLOR};
    }}

    /* ===== Progress ===== */
    QProgressBar {{
        border: none;
        background-color: #E9ECEF;
        border-radius: 3px;
    }}

    QProgressBar::chunk {{
        background-color: {Config.PRIMARY_COLOR};
        border-radius: 3px;
    }}
    """
