from typing import List

from send_guard.scanning.models import AttachmentRef


class MessageSource:
    """
    Base contract for the host's outgoing-message object.

    Mirrors what a mail client exposes at send time: subject and attachment
    list are read synchronously, while the two body renderings are fetched
    asynchronously and may fail independently of each other. The scanner
    treats a failure on any of these channels as empty content.
    """

    @property
    def subject(self) -> str:
        """
        Subject line of the outgoing message.

        Raises:
            NotImplementedError: Must be implemented by concrete sources
        """
        raise NotImplementedError("Must implement subject")

    @property
    def attachments(self) -> List[AttachmentRef]:
        """
        Attachment references in the order the host lists them.

        Raises:
            NotImplementedError: Must be implemented by concrete sources
        """
        raise NotImplementedError("Must implement attachments")

    async def get_body_text(self) -> str:
        """
        Retrieve the body coerced to plain text.

        Returns:
            str: Plain-text body; implementations may raise on failure

        Raises:
            NotImplementedError: Must be implemented by concrete sources
        """
        raise NotImplementedError("Must implement get_body_text")

    async def get_body_html(self) -> str:
        """
        Retrieve the body as HTML.

        Returns:
            str: HTML body; implementations may raise on failure

        Raises:
            NotImplementedError: Must be implemented by concrete sources
        """
        raise NotImplementedError("Must implement get_body_html")
