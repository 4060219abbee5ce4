from typing import Literal

MessageStatus = Literal['success', 'warning', 'error']


class UIManager(object):

    def __init__(self, api):
        self.api = api

    def show_msg(self, content: str, status: MessageStatus = 'success') -> str | None:
        """Shows a toast message and returns its key"""
        return self.api.call("logseq.UI.showMsg", content, status)

    def close_msg(self, key: str):
        return self.api.call("logseq.UI.closeMsg", key)
