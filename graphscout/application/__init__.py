"""Application layer: typed events and the publish-subscribe bus."""
