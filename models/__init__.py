from models.blocks import BlockProperties, BlockToInsert, EnrichmentResult

__all__ = ['BlockProperties', 'BlockToInsert', 'EnrichmentResult']
