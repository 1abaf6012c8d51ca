"""Output emission - indentation-aware builder and Vagrantfile rendering"""

from .indentation_builder import IndentationAwareStringBuilder, IndentationType
from .vagrantfile import VagrantfileEmitter, render_vagrantfile

__all__ = [
    'IndentationAwareStringBuilder',
    'IndentationType',
    'VagrantfileEmitter',
    'render_vagrantfile'
]
