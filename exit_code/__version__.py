__title__ = "exit-code"
__description__ = "Common process exit codes following the BSD sysexits.h convention."
__url__ = "https://github.com/l0westbob/exit-code"
__version__ = "1.0.0"
__license__ = "GPLv3"
