"""FastAPI dependencies exposing the app-owned board and session store."""

from fastapi import Request

from .board import Board, SessionStore


def get_board(request: Request) -> Board:
    return request.app.state.board


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store
