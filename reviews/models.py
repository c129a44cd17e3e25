from dataclasses import dataclass


@dataclass
class Review:
    id: str
    book_id: str
    author: str
    rating: int
    title: str
    comment: str
    timestamp: str
    verified: bool = False

    # bookId, id and timestamp are fixed once the review exists.
    UPDATABLE_FIELDS = ('author', 'rating', 'title', 'comment', 'verified')

    def __str__(self):
        return f'Review by {self.author} on {self.book_id}'

    def apply_update(self, changes: dict) -> None:
        for name in self.UPDATABLE_FIELDS:
            if name in changes:
                setattr(self, name, changes[name])

    @classmethod
    def from_dict(cls, data: dict) -> 'Review':
        return cls(
            id=data['id'],
            book_id=data.get('bookId', ''),
            author=data.get('author', ''),
            rating=data.get('rating', 0),
            title=data.get('title', ''),
            comment=data.get('comment', ''),
            timestamp=data.get('timestamp', ''),
            verified=data.get('verified', False),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'bookId': self.book_id,
            'author': self.author,
            'rating': self.rating,
            'title': self.title,
            'comment': self.comment,
            'timestamp': self.timestamp,
            'verified': self.verified,
        }
