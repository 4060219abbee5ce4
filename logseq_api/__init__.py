from logseq_api.api import LogseqApi, LogseqApiError

__all__ = ['LogseqApi', 'LogseqApiError']
