"""
Core: нормализованное десятичное число, математические примитивы,
форматирование и контракты персистентности.
"""
