from sqlalchemy import select, insert, func
import logging

from .database import ContactMessage
from .interfaces import ContactMessageInterface
from .dto import ContactMessageDTO
from .db_manager import DatabaseManager

class ContactMessageGateway(ContactMessageInterface):
    __slots__ = ("_db_manager", "_logger")

    def __init__(self, db_manager: DatabaseManager, logger: logging.Logger | None = None):
        self._db_manager = db_manager
        self._logger = logger or logging.getLogger(__name__)

    async def create_message(self, name: str, email: str, message: str) -> ContactMessageDTO:
        async with self._db_manager.session() as session:
            try:
                stmt = insert(ContactMessage).values(
                    name=name,
                    email=email,
                    message=message
                ).returning(ContactMessage)
                result = await session.execute(stmt)
                contact_message = result.scalars().first()
                return ContactMessageDTO.model_validate(contact_message)
            except Exception as e:
                self._logger.error("Error creating contact message in database: %s", e)
                raise

    async def get_messages(self) -> list[ContactMessageDTO]:
        async with self._db_manager.session() as session:
            try:
                stmt = select(ContactMessage).order_by(
                    ContactMessage.created_at.desc(),
                    ContactMessage.id.desc()
                )
                result = await session.execute(stmt)
                return [
                    ContactMessageDTO.model_validate(contact_message)
                    for contact_message in result.scalars().all()
                ]
            except Exception as e:
                self._logger.error("Error getting contact messages from database: %s", e)
                raise

    async def count_messages(self) -> int:
        async with self._db_manager.session() as session:
            try:
                stmt = select(func.count()).select_from(ContactMessage)
                result = await session.execute(stmt)
                return result.scalar_one()
            except Exception as e:
                self._logger.error("Error counting contact messages in database: %s", e)
                raise
