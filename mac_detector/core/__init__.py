"""
Ядро MAC Detector: нормализация MAC, модели, исключения, логирование,
контракты внешних возможностей (файловая система, команды, список интерфейсов).
"""
