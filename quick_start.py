import numpy as np
import pandas as pd

from feature_selection_analysis import (
    information_gain,
    max_pmi_per_feature,
    pairwise_mutual_information,
    select_informative_features,
)


def main():
    """
    A small, self-contained example of the feature selection workflow.
    """
    print("--- Starting Feature Selection ---")

    # 1. --- Data Generation ---
    rng = np.random.default_rng(42)
    vocabulary = [f"word_{j}" for j in range(12)]
    classes = ["sports", "politics", "science"]

    # The first three words lean towards one class each; the rest are noise.
    rows = []
    for doc_id in range(300):
        label = classes[doc_id % len(classes)]
        weights = np.ones(len(vocabulary))
        weights[classes.index(label)] = 6.0
        tokens = rng.choice(vocabulary, size=20, p=weights / weights.sum())
        rows.extend({"word": token, "label": label} for token in tokens)
    tokens_df = pd.DataFrame(rows)
    print(
        f"\nStep 1: Generated {tokens_df.shape[0]} tokens over {len(vocabulary)} words "
        f"and {len(classes)} classes."
    )

    # 2. --- Frequency Table ---
    crosstab = pd.crosstab(tokens_df["word"], tokens_df["label"])
    features = {
        word: {label: int(count) for label, count in row.items() if count}
        for word, row in crosstab.iterrows()
    }
    print("Step 2: Counted word/class co-occurrences.")

    # 3. --- Scores ---
    ig = information_gain(features)
    pmi = pairwise_mutual_information(features)
    print("Step 3: Computed Information Gain and Pairwise Mutual Information.")

    # 4. --- Selection ---
    selected, ranked = select_informative_features(ig, top_k=3)
    strongest_pmi = max_pmi_per_feature(pmi)

    # --- Display Results ---
    print("\n--- Analysis Complete ---")
    print("\nTop words by Information Gain:")
    for word, score in ranked.head(5).items():
        print(f"  - {word}: IG = {score:.4f}, max PMI = {strongest_pmi[word]:.4f}")

    print(f"\nSelected features: {', '.join(selected)}")
    print("(word_0, word_1 and word_2 carry the class signal)")


if __name__ == "__main__":
    main()
