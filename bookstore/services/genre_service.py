import uuid
from sqlalchemy.orm import Session

from bookstore.core.exceptions import Conflict, NotFound
from bookstore.core.logging import get_logger
from bookstore.models.genre import Genre
from bookstore.repos.genre_repo import GenreRepository
from bookstore.schemas.genre import GenreCreate, GenreUpdate

logger = get_logger(__name__)


class GenreService:
    @staticmethod
    # Create genre; names are unique (case-sensitive)
    def create_genre(db: Session, data: GenreCreate) -> Genre:
        if GenreRepository.get_by_name(db, data.name):
            raise Conflict("Genre already exists")
        genre = GenreRepository.create(db, data.name)
        db.commit()
        db.refresh(genre)
        logger.info("Created genre %s", genre.id)
        return genre

    @staticmethod
    # List genres
    def list_genres(db: Session) -> list[Genre]:
        return GenreRepository.list(db)

    @staticmethod
    # Genre detail with its books
    def get_genre(db: Session, genre_id: uuid.UUID) -> Genre:
        genre = GenreRepository.get(db, genre_id, with_books=True)
        if genre is None:
            raise NotFound("Genre not found")
        return genre

    @staticmethod
    # Rename genre
    def update_genre(db: Session, genre_id: uuid.UUID, data: GenreUpdate) -> Genre:
        genre = GenreRepository.get(db, genre_id)
        if genre is None:
            raise NotFound("Genre not found")

        if data.name is not None:
            duplicate = GenreRepository.get_by_name(db, data.name)
            if duplicate is not None and duplicate.id != genre.id:
                raise Conflict("Genre name already exists")
            genre.name = data.name

        db.commit()
        db.refresh(genre)
        return genre

    @staticmethod
    # Delete genre unless books still reference it
    def delete_genre(db: Session, genre_id: uuid.UUID) -> None:
        genre = GenreRepository.get(db, genre_id)
        if genre is None:
            raise NotFound("Genre not found")

        if GenreRepository.count_books(db, genre_id) > 0:
            raise Conflict("Cannot delete genre with existing books")

        GenreRepository.delete(db, genre)
        db.commit()
        logger.info("Deleted genre %s", genre_id)
