from fastapi import APIRouter, Path
from typing import Annotated
import uuid
from starlette.status import HTTP_201_CREATED

from bookstore.api.deps import CurrentUser, DbSession
from bookstore.schemas.common import ApiResponse
from bookstore.schemas.genre import GenreCreate, GenreDetail, GenreRead, GenreUpdate
from bookstore.services.genre_service import GenreService

router = APIRouter(prefix="/genre", tags=["genre"])

GenreId = Annotated[uuid.UUID, Path(description="Genre ID")]


@router.post("", response_model=ApiResponse[GenreRead], status_code=HTTP_201_CREATED)
def create_genre(data: GenreCreate, db: DbSession, _user: CurrentUser):
    genre = GenreService.create_genre(db, data)
    return ApiResponse[GenreRead](
        message="Genre created successfully",
        data=GenreRead.model_validate(genre),
    )


@router.get("", response_model=ApiResponse[list[GenreRead]])
def list_genres(db: DbSession):
    genres = GenreService.list_genres(db)
    return ApiResponse[list[GenreRead]](
        message="Genres retrieved successfully",
        data=[GenreRead.model_validate(g) for g in genres],
    )


@router.get("/{genre_id}", response_model=ApiResponse[GenreDetail])
def get_genre(genre_id: GenreId, db: DbSession):
    genre = GenreService.get_genre(db, genre_id)
    return ApiResponse[GenreDetail](
        message="Genre detail retrieved successfully",
        data=GenreDetail.model_validate(genre),
    )


@router.patch("/{genre_id}", response_model=ApiResponse[GenreRead])
def update_genre(genre_id: GenreId, data: GenreUpdate, db: DbSession, _user: CurrentUser):
    genre = GenreService.update_genre(db, genre_id, data)
    return ApiResponse[GenreRead](
        message="Genre updated successfully",
        data=GenreRead.model_validate(genre),
    )


@router.delete("/{genre_id}", response_model=ApiResponse[None])
def delete_genre(genre_id: GenreId, db: DbSession, _user: CurrentUser):
    GenreService.delete_genre(db, genre_id)
    return ApiResponse[None](message="Genre deleted successfully")
