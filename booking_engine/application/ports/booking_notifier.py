from abc import ABC, abstractmethod

from booking_engine.domain.entities.booking import Booking


class BookingNotifierPort(ABC):
    @abstractmethod
    def notify_new_booking(self, booking: Booking, language: str) -> None:
        """Tell the studio about a new public booking. Formatting and delivery belong to the adapter."""
        raise NotImplementedError
