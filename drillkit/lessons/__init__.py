"""Worked solutions to course topics: basics, quizzes, sequences, options, structs, hash maps, testing, errors, iterators and traits."""