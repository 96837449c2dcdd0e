"""
Metro Booking Backend - Build Script

도시 간 지하철 여정 계산 서비스 (FastAPI + CLI)
"""

from setuptools import setup, find_packages


setup(
    name='metro-booking',
    version='1.0.0',
    author='Metro Booking Team',
    description='Shortest-path trip planner and timetable service for a small metro network',
    long_description='''
    Dijkstra shortest-path routing over a fixed inter-city metro network with
    per-leg timetables (10 minute stops, 06:00 AM - 08:00 PM service window),
    exposed as a FastAPI service and a command line tool.
    ''',
    packages=find_packages(include=['app', 'app.*']),
    install_requires=[
        'fastapi>=0.100.0',
        'pydantic>=2.0',
        'python-dotenv>=1.0.0',
        'uvicorn>=0.23.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
            'httpx>=0.24',
        ],
    },
    entry_points={
        'console_scripts': [
            'metro-trip=app.cli:main',
        ],
    },
    zip_safe=False,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
)
