import time
from dataclasses import dataclass, field
from typing import List

from django.utils.crypto import get_random_string

ID_CHARS = 'abcdefghijklmnopqrstuvwxyz0123456789'


def generate_id(prefix=''):
    """'<prefix>-<epoch ms>-<7 random chars>', e.g. 'book-1714557600000-k3x9a1b'."""
    stamp = f'{int(time.time() * 1000)}-{get_random_string(7, ID_CHARS)}'
    return f'{prefix}-{stamp}' if prefix else stamp


@dataclass
class Book:
    id: str
    title: str
    author: str
    description: str
    price: float
    isbn: str
    genre: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    date_published: str = ''
    pages: int = 1
    language: str = ''
    publisher: str = ''
    image: str = ''
    rating: float = 0
    review_count: int = 0
    in_stock: bool = True
    featured: bool = False

    # Fields a client may change; id and the rating aggregates are not among them.
    UPDATABLE_FIELDS = (
        'title', 'author', 'description', 'price', 'image', 'isbn', 'genre', 'tags',
        'date_published', 'pages', 'language', 'publisher', 'in_stock', 'featured',
    )

    def __str__(self):
        return f'{self.title}, by {self.author}'

    def apply_update(self, changes: dict) -> None:
        for name in self.UPDATABLE_FIELDS:
            if name in changes:
                setattr(self, name, changes[name])

    @property
    def popularity(self) -> float:
        return (self.rating or 0) * (self.review_count or 0)

    @classmethod
    def from_dict(cls, data: dict) -> 'Book':
        """Create a Book from its stored (camelCase) JSON form."""
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            author=data.get('author', ''),
            description=data.get('description', ''),
            price=data.get('price', 0),
            image=data.get('image', ''),
            isbn=data.get('isbn', ''),
            genre=list(data.get('genre', [])),
            tags=list(data.get('tags', [])),
            date_published=data.get('datePublished', ''),
            pages=data.get('pages', 1),
            language=data.get('language', ''),
            publisher=data.get('publisher', ''),
            rating=data.get('rating', 0),
            review_count=data.get('reviewCount', 0),
            in_stock=data.get('inStock', True),
            featured=data.get('featured', False),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'description': self.description,
            'price': self.price,
            'image': self.image,
            'isbn': self.isbn,
            'genre': list(self.genre),
            'tags': list(self.tags),
            'datePublished': self.date_published,
            'pages': self.pages,
            'language': self.language,
            'publisher': self.publisher,
            'rating': self.rating,
            'reviewCount': self.review_count,
            'inStock': self.in_stock,
            'featured': self.featured,
        }
