from setuptools import find_packages, setup

# Minimal setup.py to allow pip installation in environments (like p4a) that
# default to legacy builds and need explicit python_requires.

package_list = find_packages(
  include=[
    "entrypoints",
    "entrypoints.*",
    "backend",
    "backend.*",
    "os_interfaces",
    "os_interfaces.*",
  ]
)

setup(
  name="tiptime",
  version="0.1.0",
  description="Tip calculator app with localized currency formatting",
  python_requires=">=3.11",
  packages=package_list,
  include_package_data=True,
  package_data={
    "backend": [
      "resources/*.yaml",
      "frontend/*.html",
      "frontend/assets/*",
    ],
  },
  install_requires=[
    "fastapi>=0.115",
    "uvicorn[standard]",
    "pywebview",
    "pyyaml",
    "pydantic>=2",
    "python-dotenv",
    "platformdirs",
    "asgi-correlation-id",
    "slowapi",
    "babel>=2.12",
  ],
  extras_require={
    "android": ["pyjnius", "cython==3.0.12", "buildozer"],
    "dev": ["pytest", "pytest-asyncio", "pytest-cov", "httpx"],
  },
  entry_points={
    "console_scripts": [
      "tiptime=entrypoints.tiptime_app_linux:main",
    ],
  },
)
