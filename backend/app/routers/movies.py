from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.core.auth import get_current_user
from app.core.config import Settings, get_settings
from app.core.exceptions import handle_exception
from app.core.interfaces import MediaClientInterface
from app.core.media_client import get_media_client
from app.db import get_db
from app.schemas.movie import (
    MovieCreate, MovieUpdate, MovieResponse, MovieListResponse, MessageResponse
)
from app.services.movie_service import MovieService, PosterUpload

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    dependencies=[Depends(get_current_user)],
)

def get_movie_service(
    db: Session = Depends(get_db),
    media_client: MediaClientInterface = Depends(get_media_client),
    settings: Settings = Depends(get_settings),
) -> MovieService:
    return MovieService(db, media_client, settings)

def read_poster(poster: Optional[UploadFile], max_bytes: int) -> Optional[PosterUpload]:
    """Read at most max_bytes + 1 bytes of the already spooled upload; a longer read marks the file as too large"""
    if poster is None or not poster.filename:
        return None
    data = poster.file.read(max_bytes + 1)
    if not data:
        return None
    return PosterUpload(
        data=data,
        filename=poster.filename,
        content_type=poster.content_type or "application/octet-stream",
    )

@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    title: str = Form(...),
    publishing_year: int = Form(..., alias="publishingYear"),
    poster: Optional[UploadFile] = File(None),
    movie_service: MovieService = Depends(get_movie_service),
):
    """Create a movie; the poster image is required"""
    try:
        movie_data = MovieCreate(title=title, publishing_year=publishing_year)
        upload = read_poster(poster, movie_service.settings.MAX_POSTER_BYTES)
        return movie_service.create_movie(movie_data, upload)
    except Exception as e:
        raise handle_exception(e)

@router.get("", response_model=MovieListResponse)
def list_movies(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=100, description="Page size"),
    search: Optional[str] = Query(None, description="Case-insensitive title filter"),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return movie_service.list_movies(page, limit, search)
    except Exception as e:
        raise handle_exception(e)

@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return movie_service.get_movie(movie_id)
    except Exception as e:
        raise handle_exception(e)

@router.put("/{movie_id}", response_model=MovieResponse)
def update_movie(
    movie_id: int,
    title: Optional[str] = Form(None),
    publishing_year: Optional[int] = Form(None, alias="publishingYear"),
    poster: Optional[UploadFile] = File(None),
    movie_service: MovieService = Depends(get_movie_service),
):
    """Update supplied fields; a new poster replaces the stored one"""
    try:
        update_data = MovieUpdate(title=title, publishing_year=publishing_year)
        upload = read_poster(poster, movie_service.settings.MAX_POSTER_BYTES)
        return movie_service.update_movie(movie_id, update_data, upload)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{movie_id}", response_model=MessageResponse)
def delete_movie(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service),
):
    """Delete a movie together with its poster"""
    try:
        return movie_service.delete_movie(movie_id)
    except Exception as e:
        raise handle_exception(e)
