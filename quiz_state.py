# quiz_state.py

ANSWER_COUNT = 3


class MalformedQuestionError(ValueError):
    pass


class Question:
    def __init__(self, text, answer_options, correct_index):
        self.text = text
        self.answer_options = tuple(answer_options)
        self.correct_index = correct_index

    @classmethod
    def from_dict(cls, data):
        """
        Builds a Question from a provider payload entry.

        Accepts {"question", "answers", "correctAnswerIndex"}. Raises
        MalformedQuestionError unless there are exactly ANSWER_COUNT non-empty
        answers and the correct index points at one of them.
        """
        if not isinstance(data, dict):
            raise MalformedQuestionError(f"Question must be an object, got {type(data).__name__}")
        text = data.get("question")
        answers = data.get("answers")
        correct_index = data.get("correctAnswerIndex")

        if not isinstance(text, str) or not text.strip():
            raise MalformedQuestionError("Question text is missing")
        if not isinstance(answers, (list, tuple)) or len(answers) != ANSWER_COUNT:
            raise MalformedQuestionError(f"Expected {ANSWER_COUNT} answers, got {answers!r}")
        if not all(isinstance(a, str) and a.strip() for a in answers):
            raise MalformedQuestionError(f"Answers must be non-empty strings: {answers!r}")
        # bool is an int subclass; True would silently mean index 1
        if isinstance(correct_index, bool) or not isinstance(correct_index, int):
            raise MalformedQuestionError(f"Correct index must be an integer, got {correct_index!r}")
        if not 0 <= correct_index < ANSWER_COUNT:
            raise MalformedQuestionError(f"Correct index {correct_index} out of range")
        return cls(text.strip(), [a.strip() for a in answers], correct_index)

    @property
    def correct_answer(self):
        return self.answer_options[self.correct_index]

    @property
    def wrong_answers(self):
        return [a for i, a in enumerate(self.answer_options) if i != self.correct_index]

    def __repr__(self):
        return f"Question({self.text!r}, {list(self.answer_options)!r}, {self.correct_index})"


class Token:
    def __init__(self, id, text, is_correct, x, y, velocity_y, width, height):
        self.id = id
        self.text = text
        self.is_correct = is_correct
        self.x = x
        self.y = y
        self.velocity_y = velocity_y
        self.width = width
        self.height = height

    def rect(self):
        return (self.x, self.y, self.width, self.height)

    def __repr__(self):
        return f"Token({self.id!r}, {self.text!r}, correct={self.is_correct}, y={self.y:.1f})"


class Feedback:
    def __init__(self, message, positive):
        self.message = message
        self.positive = positive


class SessionState:
    """Everything that changes during one game, mutated only inside a tick."""

    def __init__(self, time_remaining):
        self.score = 0
        self.time_remaining = time_remaining
        self.current_question_index = 0
        self.tokens = []
        self.terminated = False
        self.feedback = None

    def add_score(self, delta):
        # Score never goes below zero
        self.score = max(0, self.score + delta)
