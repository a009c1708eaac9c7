"""SlideSmith service packages."""
