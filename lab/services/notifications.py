import datetime

from lab.models import Notification


def notify(user_id: int, message: str, ntype: str = Notification.TYPE_GENERAL) -> Notification:
    return Notification.objects.create(user_id=user_id, message=message, ntype=ntype)


def notify_booking(user_id: int, *, what: str, test_type: str, time: str, date: datetime.date) -> Notification:
    message = f"Your {what} for {test_type} at {time} on {date.strftime('%d/%m/%Y')} has been booked successfully"
    return notify(user_id, message, Notification.TYPE_APPOINTMENT)


def notify_result(user_id: int, test_name: str, *, updated: bool = False) -> Notification:
    if updated:
        message = f"Your test result has been updated: {test_name}"
    else:
        message = f"A new test result has been added: {test_name}"
    return notify(user_id, message, Notification.TYPE_TEST_RESULT)
