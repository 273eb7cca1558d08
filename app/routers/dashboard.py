# app/routers/dashboard.py
from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User

router = APIRouter(tags=["dashboard"])


def _templates(request: Request):
    """Use the shared Jinja instance + helpers registered in main.py."""
    return request.app.state.templates


@router.get("/", response_class=HTMLResponse)
def dashboard_home(request: Request, db: Session = Depends(get_db)):
    total = db.query(func.count(User.id)).scalar() or 0
    newest = db.query(User).order_by(User.id.desc()).limit(5).all()
    return _templates(request).TemplateResponse(
        request,
        "dashboard/index.html",
        {"title": "Dashboard", "section": "dashboard", "total": total, "newest": newest},
    )
