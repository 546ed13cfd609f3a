import requests

from groove_core import log_action


class Notifier:
    """Delivery side of exercise and sprint alerts."""

    def schedule_at(self, notification_id: int, title: str, body: str, when, payload: str):
        raise NotImplementedError

    def cancel(self, notification_id: int):
        raise NotImplementedError

    def cancel_all(self):
        raise NotImplementedError

    def show_now(self, notification_id: int, title: str, body: str, payload: str):
        raise NotImplementedError


class LogNotifier(Notifier):
    """Records alerts in the action log instead of delivering them."""

    def schedule_at(self, notification_id, title, body, when, payload):
        log_action("notify_schedule", {"id": notification_id, "title": title, "time": when.isoformat(), "payload": payload})
        return True

    def cancel(self, notification_id):
        log_action("notify_cancel", {"id": notification_id})
        return True

    def cancel_all(self):
        log_action("notify_cancel_all")
        return True

    def show_now(self, notification_id, title, body, payload):
        log_action("notify_show", {"id": notification_id, "title": title, "payload": payload})
        return True


class WebhookNotifier(Notifier):
    """
    Hands alerts to a push gateway over HTTP.

    The gateway owns actual delivery and the tap callback; each call
    returns True when the gateway accepted it.
    """

    def __init__(self, base_url: str, timeout: float = 1.5):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _post(self, path: str, payload: dict):
        try:
            r = requests.post(f"{self.base_url}{path}", json=payload, timeout=self.timeout)
            r.raise_for_status()
            return True
        except requests.RequestException as e:
            log_action("notify_failed", {"path": path, "error": str(e)})
            return False

    def schedule_at(self, notification_id, title, body, when, payload):
        return self._post("/schedule", {
            "id": notification_id,
            "title": title,
            "body": body,
            "time": when.isoformat(),
            "payload": payload,
        })

    def cancel(self, notification_id):
        return self._post("/cancel", {"id": notification_id})

    def cancel_all(self):
        return self._post("/cancel-all", {})

    def show_now(self, notification_id, title, body, payload):
        return self._post("/show", {
            "id": notification_id,
            "title": title,
            "body": body,
            "payload": payload,
        })
