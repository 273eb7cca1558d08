# app/routers/users.py
from fastapi import APIRouter, Request, Depends, Query
from fastapi.responses import HTMLResponse
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User

router = APIRouter(prefix="/users", tags=["users"])

PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _templates(request: Request):
    return request.app.state.templates


@router.get("", response_class=HTMLResponse)
def list_users(
    request: Request,
    limit: int = PAGE_SIZE,
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    limit = max(1, min(limit, MAX_PAGE_SIZE))
    total = db.query(func.count(User.id)).scalar() or 0
    users = db.query(User).order_by(User.id.asc()).offset(offset).limit(limit).all()

    prev_offset = max(offset - limit, 0) if offset > 0 else None
    next_offset = offset + limit if offset + limit < total else None

    return _templates(request).TemplateResponse(
        request,
        "users/list.html",
        {
            "title": "Users",
            "section": "users",
            "users": users,
            "total": total,
            "limit": limit,
            "offset": offset,
            "prev_offset": prev_offset,
            "next_offset": next_offset,
        },
    )


@router.get("/{user_id}", response_class=HTMLResponse)
def show_user(user_id: int, request: Request, db: Session = Depends(get_db)):
    # SQLAlchemy 2.x: Session.get(Model, pk)
    user = db.get(User, user_id)
    if not user:
        return _templates(request).TemplateResponse(
            request,
            "pages/not_found.html",
            {"title": "Not found", "section": "users"},
            status_code=404,
        )
    return _templates(request).TemplateResponse(
        request,
        "users/detail.html",
        {"title": user.name, "section": "users", "user": user},
    )
