"""CodeSketch core: structural extraction and diagram generation."""
