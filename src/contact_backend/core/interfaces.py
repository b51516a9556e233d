from abc import ABC, abstractmethod

from .dto import ContactMessageDTO

class ContactMessageInterface(ABC):
    @abstractmethod
    async def create_message(
            self,
            name: str,
            email: str,
            message: str
    ) -> ContactMessageDTO:
        """
        Creates a new contact message in the database.
        :param name:
        :param email:
        :param message:
        :return: Created message
        """
        raise NotImplementedError()

    @abstractmethod
    async def get_messages(self) -> list[ContactMessageDTO]:
        """
        Gets all contact messages, newest first.
        :return: Message list
        """
        raise NotImplementedError()

    @abstractmethod
    async def count_messages(self) -> int:
        """
        Counts stored contact messages.
        :return:
        """
        raise NotImplementedError()
