"""Host application: configuration, wiring, OpenCV UI and entry point."""
