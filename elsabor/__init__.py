"""
                El Sabor Restaurant Website

Bilingual (Spanish/English) server-rendered site for the El Sabor
restaurant: menu, gallery, table reservations and contact form with
email notifications.

Author: El Sabor Web Team
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "El Sabor Web Team"
