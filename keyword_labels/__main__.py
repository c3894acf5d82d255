from keyword_labels.runner import main


if __name__ == "__main__":
    main()
