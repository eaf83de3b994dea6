"""pdfstash — assemble images into PDFs and keep them in a managed directory."""

__version__ = "0.1.0"
