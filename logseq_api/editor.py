from models import BlockToInsert


class EditorManager(object):

    def __init__(self, api):
        self.api = api

    def insert_batch_block(self, uuid: str, batch: list[BlockToInsert], sibling: bool = True):
        return self.api.call("logseq.Editor.insertBatchBlock", uuid, [block.to_dict() for block in batch],
                             {"sibling": sibling})

    def update_block(self, uuid: str, content: str):
        return self.api.call("logseq.Editor.updateBlock", uuid, content)

    def remove_block(self, uuid: str):
        return self.api.call("logseq.Editor.removeBlock", uuid)

    def exit_editing_mode(self, select_block: bool = False):
        return self.api.call("logseq.Editor.exitEditingMode", select_block)
