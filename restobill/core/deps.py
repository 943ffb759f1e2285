# restobill/core/deps.py

from fastapi import Request

from restobill.modules.pos.services.pos_service import PosService


def get_pos_service(request: Request) -> PosService:
    """POS service bound to the running application"""
    return request.app.state.pos_service
