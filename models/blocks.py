from dataclasses import dataclass, field, asdict


@dataclass
class BlockProperties:
    todoistid: str
    attachments: str = ""
    comments: str = ""


@dataclass
class BlockToInsert:
    content: str
    properties: BlockProperties
    children: list['BlockToInsert'] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Batch block shape accepted by Logseq's insertBatchBlock"""
        return {
            'content': self.content,
            'properties': asdict(self.properties),
            'children': [child.to_dict() for child in self.children],
        }


@dataclass
class EnrichmentResult:
    block: BlockToInsert
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
