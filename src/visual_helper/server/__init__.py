"""
Server Layer for Visual Helper

This package contains the local HTTP service that the design plugin and
other tools talk to: screen captures, export uploads, capture history, live
monitoring, image comparison and placement queries.

Usage:
    from visual_helper.server import create_app, run_server
    run_server(port=3001)
"""

from visual_helper.server.app import create_app, run_server, VisualHistory, decode_export_image

__all__ = [
    'create_app',
    'run_server',
    'VisualHistory',
    'decode_export_image',
]
