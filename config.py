# Project description:
PROJECT_DESC = {
    'name': 'Clinical Trial Data Toolkit',
    'version': '1.0.0',
    'description': 'Loading, preprocessing, summary statistics, hypothesis testing and visualization helpers for clinical trial tabular data.',
    'license': 'MIT'
}

# Data paths
DATA_PATHS = {
    "logger": {
        "dir": "./logs/",
        "main": "./logs/main.log",
        "testing": "./logs/testing_log.log",
        "analysis": "./logs/analysis_log.log"
    },
    "img": {
        "default": "./images/",
        "outcomes": "./images/outcomes/"
    },
    "data_file": "./data/",
    "results": "./data/results/"
}

# Logging configuration
LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        },
        'detailed': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
        }
    },
    'handlers': {
        'file_handler': {
            'class': 'logging.FileHandler',
            'filename': DATA_PATHS['logger']['main'],
            'formatter': 'simple',
            'level': 'WARNING',
            'mode': 'w'
        },
        'testing_handler': {
            'class': 'logging.FileHandler',
            'filename': DATA_PATHS['logger']['testing'],
            'formatter': 'detailed',
            'level': 'DEBUG',
            'mode': 'w'
        },
        'analysis_handler': {
            'class': 'logging.FileHandler',
            'filename': DATA_PATHS['logger']['analysis'],
            'formatter': 'detailed',
            'level': 'INFO',
            'mode': 'w'
        }
    },
    'loggers': {
        'analysis': {
            'handlers': ['analysis_handler'],
            'level': 'INFO',
            'propagate': True
        },
        'utils': {
            'handlers': ['analysis_handler'],
            'level': 'WARNING',
            'propagate': True
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['file_handler']
    }
}

# Project settings
PROJECT_SETTINGS = {
    "log_level": "INFO",
    }

# === Clinical trial data settings ===

CLINICAL_TRIAL_SETTINGS = {
    # column order matters: schema errors list missing columns in this order
    "required_columns": ["PatientID", "Treatment", "Outcome", "Visit_Date"],
    "test_columns": ["Treatment", "Outcome"],
    "date_column": "Visit_Date",
    "date_format": "%Y-%m-%d",
    # 'lenient': unparseable dates become NaT, 'strict': raise DateFormatError
    "date_mode": "lenient",
    "yates_correction": False,
    "significance_level": 0.05,
    "outcome_colors": {
        "Success": "#2ca02c",  # green
        "Failure": "#d62728"   # red
    }
}

# Plot settings
PLOT_SETTINGS = {
    "title": "Distribution of Treatment Outcomes",
    "xlabel": "Treatment",
    "ylabel": "Count",
    "figsize": (12, 8),
    "dpi": 300
}
