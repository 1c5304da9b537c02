# coding: utf-8

VERSION = (2021, 11, 24)
S_VERSION = ".".join(map(str, VERSION))
S_BUILD_DT = "{0:04d}-{1:02d}-{2:02d}".format(*VERSION)

VERSION_SERIAL = "GoFS Version " + S_VERSION
