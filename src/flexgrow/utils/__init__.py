from .func import *
