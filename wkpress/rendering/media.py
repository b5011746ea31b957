"""
Concrete generators for wkhtmltopdf and wkhtmltoimage.

Each generator registers the command-line options its binary accepts. Option
names are the long flag names without the leading dashes.
"""

import os

from dotenv import load_dotenv

from wkpress.rendering.generator import Generator

load_dotenv()

WKHTMLTOPDF_BINARY = os.getenv("WKHTMLTOPDF_BINARY", "/usr/local/bin/wkhtmltopdf")
WKHTMLTOIMAGE_BINARY = os.getenv("WKHTMLTOIMAGE_BINARY", "/usr/local/bin/wkhtmltoimage")

# Global, outline and page options of wkhtmltopdf 0.12
PDF_OPTIONS = [
    # Global
    "collate",
    "no-collate",
    "cookie-jar",
    "copies",
    "dpi",
    "extended-help",
    "grayscale",
    "help",
    "htmldoc",
    "image-dpi",
    "image-quality",
    "license",
    "lowquality",
    "manpage",
    "margin-bottom",
    "margin-left",
    "margin-right",
    "margin-top",
    "orientation",
    "page-height",
    "page-size",
    "page-width",
    "no-pdf-compression",
    "quiet",
    "read-args-from-stdin",
    "readme",
    "title",
    "use-xserver",
    "version",
    # Outline
    "dump-default-toc-xsl",
    "dump-outline",
    "outline",
    "no-outline",
    "outline-depth",
    # Page
    "allow",
    "background",
    "no-background",
    "bypass-proxy-for",
    "cache-dir",
    "checkbox-checked-svg",
    "checkbox-svg",
    "cookie",
    "custom-header",
    "custom-header-propagation",
    "no-custom-header-propagation",
    "debug-javascript",
    "no-debug-javascript",
    "default-header",
    "encoding",
    "disable-external-links",
    "enable-external-links",
    "disable-forms",
    "enable-forms",
    "images",
    "no-images",
    "disable-internal-links",
    "enable-internal-links",
    "disable-javascript",
    "enable-javascript",
    "javascript-delay",
    "keep-relative-links",
    "load-error-handling",
    "load-media-error-handling",
    "disable-local-file-access",
    "enable-local-file-access",
    "minimum-font-size",
    "exclude-from-outline",
    "include-in-outline",
    "page-offset",
    "password",
    "disable-plugins",
    "enable-plugins",
    "post",
    "post-file",
    "print-media-type",
    "no-print-media-type",
    "proxy",
    "radiobutton-checked-svg",
    "radiobutton-svg",
    "resolve-relative-links",
    "run-script",
    "disable-smart-shrinking",
    "enable-smart-shrinking",
    "stop-slow-scripts",
    "no-stop-slow-scripts",
    "disable-toc-back-links",
    "enable-toc-back-links",
    "user-style-sheet",
    "username",
    "viewport-size",
    "window-status",
    "zoom",
    # Headers and footers
    "footer-center",
    "footer-font-name",
    "footer-font-size",
    "footer-html",
    "footer-left",
    "footer-line",
    "no-footer-line",
    "footer-right",
    "footer-spacing",
    "header-center",
    "header-font-name",
    "header-font-size",
    "header-html",
    "header-left",
    "header-line",
    "no-header-line",
    "header-right",
    "header-spacing",
    "replace",
    # Table of contents
    "disable-dotted-lines",
    "cover",
    "toc",
    "toc-depth",
    "toc-font-name",
    "toc-l1-font-size",
    "toc-header-text",
    "toc-header-font-name",
    "toc-header-font-size",
    "toc-level-indentation",
    "disable-toc-links",
    "toc-text-size-shrink",
    "xsl-style-sheet",
]

IMAGE_OPTIONS = [
    "allow",
    "bypass-proxy-for",
    "cache-dir",
    "checkbox-checked-svg",
    "checkbox-svg",
    "cookie",
    "cookie-jar",
    "crop-h",
    "crop-w",
    "crop-x",
    "crop-y",
    "custom-header",
    "custom-header-propagation",
    "no-custom-header-propagation",
    "debug-javascript",
    "no-debug-javascript",
    "encoding",
    "format",
    "height",
    "images",
    "no-images",
    "disable-javascript",
    "enable-javascript",
    "javascript-delay",
    "load-error-handling",
    "load-media-error-handling",
    "disable-local-file-access",
    "enable-local-file-access",
    "minimum-font-size",
    "password",
    "disable-plugins",
    "enable-plugins",
    "post",
    "post-file",
    "proxy",
    "quality",
    "quiet",
    "radiobutton-checked-svg",
    "radiobutton-svg",
    "run-script",
    "disable-smart-width",
    "enable-smart-width",
    "stop-slow-scripts",
    "no-stop-slow-scripts",
    "transparent",
    "use-xserver",
    "user-style-sheet",
    "username",
    "width",
    "window-status",
    "zoom",
]


class Pdf(Generator):
    """PDF generator backed by wkhtmltopdf."""

    DEFAULT_BINARY = WKHTMLTOPDF_BINARY
    DEFAULT_EXTENSION = "pdf"

    def configure(self) -> None:
        self.add_options(dict.fromkeys(PDF_OPTIONS))


class Image(Generator):
    """Image generator backed by wkhtmltoimage. The image format follows the output extension."""

    DEFAULT_BINARY = WKHTMLTOIMAGE_BINARY
    DEFAULT_EXTENSION = "jpg"

    def configure(self) -> None:
        self.add_options(dict.fromkeys(IMAGE_OPTIONS))


GENERATORS = {
    "pdf": Pdf,
    "image": Image,
}
