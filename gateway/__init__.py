"""Gateway Service - 운동 카탈로그 REST API"""
