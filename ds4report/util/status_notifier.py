class StatusNotifier:
    def __init__(self):
        """
        Tracks a status string and calls listeners when it changes.
        """
        self.status_change_listeners = []
        self.status = None

    def set_status(self, status):
        """
        Store the status and notify listeners. Setting the current status again is ignored.
        :param status: new status
        :return: None
        """
        if self.status == status:
            return
        self.status = status
        for listener in self.status_change_listeners:
            listener(status)

    def get_status(self):
        return self.status

    def add_status_change_listener(self, callback):
        self.status_change_listeners.append(callback)
