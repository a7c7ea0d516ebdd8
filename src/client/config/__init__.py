"""Configuration package for the task manager client"""
from .settings import config, AppConfig, APIEndpoints
from .env import env, get_env, EnvironmentConfig

__all__ = ['config', 'AppConfig', 'APIEndpoints', 'env', 'get_env', 'EnvironmentConfig']
