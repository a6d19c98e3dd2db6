from ds4report.data.constants import VERSION as __version__
