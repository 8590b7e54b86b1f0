from __future__ import annotations

from char_lm import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
        "learn the language, then let the language learn you. "
    )

    lm = LanguageModel(window_length=4, seed=20)
    lm.train(text)

    print(lm.model.to_frame().head(12).to_string(index=False))
    print()
    print(lm.generate("lear", 120))


if __name__ == "__main__":
    main()
