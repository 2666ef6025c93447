"""
API Module
==========
Flask API routes and blueprints.
"""
from transluxe.api.routes import (
    create_translation_blueprint,
    create_meta_blueprint,
    create_logs_blueprint
)

__all__ = [
    'create_translation_blueprint',
    'create_meta_blueprint',
    'create_logs_blueprint'
]
