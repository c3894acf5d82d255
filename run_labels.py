"""
Генерація міток для CSV з товарами.
Використання: python run_labels.py

Шляхи до файлів задані в keyword_labels.core.models (LabelsConfig).
"""
from keyword_labels.runner import main


if __name__ == '__main__':
    main()
