"""Chapter import and segmentation for a novel writing tool."""
