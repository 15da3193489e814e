"""
Core ambient layer: exceptions, logger and capacity configuration models.

Этот пакет не зависит от контейнерных утилит (maps, slicex, funcs)
и используется ими как общий фундамент.
"""
