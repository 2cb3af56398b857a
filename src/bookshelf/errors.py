class BookshelfError(Exception):
    status_code = 500

    @property
    def message(self) -> str:
        return str(self)


class BookNotFoundError(BookshelfError):
    status_code = 404

    def __init__(self, book_id: str):
        super().__init__(f'book {book_id} not found')
        self.book_id = book_id
