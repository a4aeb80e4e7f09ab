"""File type detection from file name extensions."""

from __future__ import annotations

from enum import Enum

__all__ = ["FileType", "detect_extension"]


class FileType(Enum):
    """Kind of file, valued by its human-readable description."""

    # Documents and text
    TXT = "Text File"
    MARKDOWN = "Markdown Document"
    PDF = "PDF Document"
    WORD = "Word Document"
    EXCEL = "Excel Spreadsheet"
    POWERPOINT = "PowerPoint Presentation"
    CSV = "CSV Spreadsheet"
    RTF = "Rich Text Document"
    ODT = "OpenDocument Text"
    ODS = "OpenDocument Spreadsheet"
    ODP = "OpenDocument Presentation"
    LATEX = "LaTeX Document"
    EPUB = "EPUB eBook"
    MOBI = "Mobipocket eBook"

    # Programming and config
    RUST = "Rust Source"
    TOML = "TOML Config"
    JSON = "JSON Data"
    YAML = "YAML Data"
    XML = "XML Data"
    HTML = "HTML Document"
    CSS = "CSS Stylesheet"
    JAVASCRIPT = "JavaScript Source"
    TYPESCRIPT = "TypeScript Source"
    PYTHON = "Python Source"
    JAVA = "Java Source"
    C = "C Source"
    CPP = "C++ Source"
    HEADER = "C/C++ Header"
    CSHARP = "C# Source"
    GO = "Go Source"
    RUBY = "Ruby Source"
    PHP = "PHP Source"
    SHELL = "Shell Script"
    SWIFT = "Swift Source"
    SQL = "SQL Script"
    INI = "INI Config"
    CONFIG = "Config File"

    # Images
    JPEG = "JPEG Image"
    PNG = "PNG Image"
    GIF = "GIF Image"
    SVG = "SVG Vector"
    BMP = "Bitmap Image"
    TIFF = "TIFF Image"
    WEBP = "WebP Image"
    ICO = "Icon File"
    TGA = "Targa Image"
    RAW = "Raw Image"
    PSD = "Photoshop Document"
    AI = "Illustrator File"
    CAMERA_RAW = "Camera RAW"
    HEIF = "HEIF/HEIC Image"
    ASTC = "ASTC Texture"
    DDS = "DirectDraw Surface"
    EXR = "OpenEXR Image"

    # Audio
    MP3 = "MP3 Audio"
    WAV = "WAV Audio"
    OGG = "OGG Audio"
    FLAC = "FLAC Audio"
    AAC = "AAC Audio"
    WMA = "Windows Media Audio"
    AIFF = "AIFF Audio"
    M4A = "MPEG-4 Audio"
    MIDI = "MIDI Audio"

    # Video
    MP4 = "MP4 Video"
    AVI = "AVI Video"
    MKV = "Matroska Video"
    MOV = "QuickTime Video"
    WMV = "Windows Media Video"
    FLV = "Flash Video"
    WEBM = "WebM Video"
    M4V = "MPEG-4 Video"
    MOBILE_3GP = "3GPP Video"
    MPEG = "MPEG Video"

    # Archives and disk images
    ZIP = "ZIP Archive"
    TAR = "TAR Archive"
    GZIP = "GZIP Compressed"
    TGZ = "Compressed TAR"
    SEVEN_ZIP = "7-Zip Archive"
    RAR = "RAR Archive"
    BZIP2 = "BZIP2 Compressed"
    XZ = "XZ Compressed"
    DMG = "macOS Disk Image"
    ISO = "ISO Disk Image"
    IMG = "Disk Image"
    VHD = "Virtual Hard Disk"
    VMDK = "VMware Disk"

    # Fonts
    TTF = "TrueType Font"
    OTF = "OpenType Font"
    WOFF = "Web Font"
    EOT = "Embedded OpenType Font"

    # Executables and binaries
    EXE = "Windows Executable"
    DLL = "Dynamic Link Library"
    SO = "Shared Object Library"
    APP = "macOS Application"
    APK = "Android Package"
    DEB = "Debian Package"
    RPM = "RPM Package"
    MSI = "Windows Installer"

    # Special cases
    NONE = "File"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


_EXTENSIONS: dict[str, FileType] = {
    "txt": FileType.TXT,
    "md": FileType.MARKDOWN,
    "markdown": FileType.MARKDOWN,
    "pdf": FileType.PDF,
    "doc": FileType.WORD,
    "docx": FileType.WORD,
    "xls": FileType.EXCEL,
    "xlsx": FileType.EXCEL,
    "ppt": FileType.POWERPOINT,
    "pptx": FileType.POWERPOINT,
    "csv": FileType.CSV,
    "rtf": FileType.RTF,
    "odt": FileType.ODT,
    "ods": FileType.ODS,
    "odp": FileType.ODP,
    "tex": FileType.LATEX,
    "epub": FileType.EPUB,
    "mobi": FileType.MOBI,
    "rs": FileType.RUST,
    "toml": FileType.TOML,
    "json": FileType.JSON,
    "yaml": FileType.YAML,
    "yml": FileType.YAML,
    "xml": FileType.XML,
    "html": FileType.HTML,
    "htm": FileType.HTML,
    "css": FileType.CSS,
    "js": FileType.JAVASCRIPT,
    "ts": FileType.TYPESCRIPT,
    "py": FileType.PYTHON,
    "java": FileType.JAVA,
    "c": FileType.C,
    "cpp": FileType.CPP,
    "cc": FileType.CPP,
    "cxx": FileType.CPP,
    "h": FileType.HEADER,
    "hpp": FileType.HEADER,
    "cs": FileType.CSHARP,
    "go": FileType.GO,
    "rb": FileType.RUBY,
    "php": FileType.PHP,
    "sh": FileType.SHELL,
    "bash": FileType.SHELL,
    "swift": FileType.SWIFT,
    "sql": FileType.SQL,
    "ini": FileType.INI,
    "conf": FileType.CONFIG,
    "jpg": FileType.JPEG,
    "jpeg": FileType.JPEG,
    "png": FileType.PNG,
    "gif": FileType.GIF,
    "svg": FileType.SVG,
    "bmp": FileType.BMP,
    "tiff": FileType.TIFF,
    "tif": FileType.TIFF,
    "webp": FileType.WEBP,
    "ico": FileType.ICO,
    "tga": FileType.TGA,
    "raw": FileType.RAW,
    "psd": FileType.PSD,
    "ai": FileType.AI,
    "cr2": FileType.CAMERA_RAW,
    "nef": FileType.CAMERA_RAW,
    "arw": FileType.CAMERA_RAW,
    "heif": FileType.HEIF,
    "heic": FileType.HEIF,
    "astc": FileType.ASTC,
    "dds": FileType.DDS,
    "exr": FileType.EXR,
    "mp3": FileType.MP3,
    "wav": FileType.WAV,
    "ogg": FileType.OGG,
    "flac": FileType.FLAC,
    "aac": FileType.AAC,
    "wma": FileType.WMA,
    "aiff": FileType.AIFF,
    "aif": FileType.AIFF,
    "m4a": FileType.M4A,
    "mid": FileType.MIDI,
    "midi": FileType.MIDI,
    "mp4": FileType.MP4,
    "avi": FileType.AVI,
    "mkv": FileType.MKV,
    "mov": FileType.MOV,
    "wmv": FileType.WMV,
    "flv": FileType.FLV,
    "webm": FileType.WEBM,
    "m4v": FileType.M4V,
    "3gp": FileType.MOBILE_3GP,
    "mpg": FileType.MPEG,
    "mpeg": FileType.MPEG,
    "zip": FileType.ZIP,
    "tar": FileType.TAR,
    "gz": FileType.GZIP,
    "gzip": FileType.GZIP,
    "tgz": FileType.TGZ,
    "7z": FileType.SEVEN_ZIP,
    "rar": FileType.RAR,
    "bz2": FileType.BZIP2,
    "xz": FileType.XZ,
    "dmg": FileType.DMG,
    "iso": FileType.ISO,
    "img": FileType.IMG,
    "vhd": FileType.VHD,
    "vhdx": FileType.VHD,
    "vmdk": FileType.VMDK,
    "ttf": FileType.TTF,
    "otf": FileType.OTF,
    "woff": FileType.WOFF,
    "woff2": FileType.WOFF,
    "eot": FileType.EOT,
    "exe": FileType.EXE,
    "dll": FileType.DLL,
    "so": FileType.SO,
    "app": FileType.APP,
    "apk": FileType.APK,
    "deb": FileType.DEB,
    "rpm": FileType.RPM,
    "msi": FileType.MSI,
    "": FileType.NONE,
}


def detect_extension(extension: str) -> FileType:
    """Return the file type for an extension (without the dot), ignoring case."""
    return _EXTENSIONS.get(extension.lower(), FileType.UNKNOWN)