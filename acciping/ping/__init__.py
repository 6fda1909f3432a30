"""Ping result types, drop reasons and rate helpers."""