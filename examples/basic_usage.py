"""
Basic usage example for the textcompare library.

This example demonstrates the core workflow:
1. Segment unspaced text with a dictionary
2. Align the segmentation against a reference
3. Score it with word error rate
"""

import json

from textcompare import align, build_dictionary, max_match, word_accuracy, word_error_rate


def evaluate_segmentation(text: str, reference: str, words: list[str]) -> dict:
    """
    Segment text and compare it with a reference segmentation.

    Args:
        text: Text without word separators
        reference: The correctly segmented sentence
        words: Dictionary words

    Returns:
        Dictionary with the segmentation, word alignment and scores
    """
    print(f"Segmenting: {text}")
    print("=" * 50)

    dictionary = build_dictionary(words)
    predicted = max_match(text, dictionary)
    print(f"\nPredicted: {predicted}")
    print(f"Reference: {reference}")

    result = align(reference.split(" "), str(predicted).split(" "), 1, "*")
    top, bottom = result.as_text(separator=" ")
    print("\nWord alignment:")
    print(f"   {top}")
    print(f"   {bottom}")
    print(
        f"   {result.substitutions} substitutions, "
        f"{result.insertions} insertions, {result.deletions} deletions"
    )

    wer = word_error_rate(reference, predicted)
    accuracy = word_accuracy(reference, predicted)
    print(f"\nWER: {wer:.3f}  accuracy: {accuracy:.3f}")

    return {
        "text": text,
        "predicted": str(predicted),
        "reference": reference,
        "word_error_rate": round(wer, 3),
        "word_accuracy": round(accuracy, 3),
        "alignment": result.model_dump(include={"top", "bottom", "distance"}),
    }


if __name__ == "__main__":
    output = evaluate_segmentation(
        "wecanonlyseeashortdistanceahead",
        "we can only see a short distance ahead",
        ["we", "canon", "see", "ash", "ort", "distance", "ahead"],
    )
    print()
    print(json.dumps(output, ensure_ascii=False, indent=2))
