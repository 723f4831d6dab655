"""
Бронирование номеров в отеле (Room Booking).

Запись о закреплении одного номера за бронированием на период
проживания, со стоимостью, дополнительными услугами и статусом.
"""

__version__ = "0.1.0"
