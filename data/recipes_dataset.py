"""Starter recipe catalog seeded into an empty database.

Also backs the in-memory recipe store when `RECIPE_STORE_BACKEND=memory`.
"""

RECIPES_DATA = [
    # Breakfasts
    {"name": "Oatmeal with Berries", "description": "Steel-cut oats topped with fresh berries and chia.", "meal_types": ["breakfast"], "dietary_tags": ["vegetarian", "high-fiber"], "calories": 420, "protein": 14, "carbs": 68, "fat": 10, "prep_time": 5, "cook_time": 10, "servings": 1,
     "ingredients": [{"name": "Oats", "amount": "0.75", "unit": "cup"}, {"name": "Blueberries", "amount": "0.5", "unit": "cup"}, {"name": "Almond milk", "amount": "1", "unit": "cup"}, {"name": "Chia seeds", "amount": "1", "unit": "tbsp"}],
     "instructions": "Bring the almond milk to a simmer.\nStir in oats and cook for 8 minutes.\nTop with blueberries and chia seeds."},
    {"name": "Greek Yogurt Parfait", "description": "Layers of yogurt, honey, granola and strawberries.", "meal_types": ["breakfast", "snack"], "dietary_tags": ["vegetarian"], "calories": 380, "protein": 24, "carbs": 48, "fat": 9, "prep_time": 5, "cook_time": 0, "servings": 1,
     "ingredients": [{"name": "Greek yogurt", "amount": "1", "unit": "cup"}, {"name": "Honey", "amount": "1", "unit": "tbsp"}, {"name": "Granola", "amount": "0.33", "unit": "cup"}, {"name": "Strawberries", "amount": "0.5", "unit": "cup"}],
     "instructions": "Layer yogurt, granola and strawberries in a glass.\nDrizzle with honey."},
    {"name": "Spinach and Mushroom Omelette", "description": "Three-egg omelette with sauteed vegetables.", "meal_types": ["breakfast"], "dietary_tags": ["vegetarian", "keto", "gluten-free"], "calories": 450, "protein": 30, "carbs": 8, "fat": 32, "prep_time": 5, "cook_time": 10, "servings": 1,
     "ingredients": [{"name": "Eggs", "amount": "3", "unit": "whole"}, {"name": "Spinach", "amount": "1", "unit": "cup"}, {"name": "Mushroom", "amount": "0.5", "unit": "cup"}, {"name": "Cheddar cheese", "amount": "30", "unit": "g"}, {"name": "Butter", "amount": "1", "unit": "tsp"}],
     "instructions": "Saute mushrooms and spinach in butter.\nPour in beaten eggs and cook until set.\nSprinkle cheese, fold and serve."},
    {"name": "Protein Pancakes", "description": "Fluffy oat pancakes with a scoop of whey.", "meal_types": ["breakfast"], "dietary_tags": ["vegetarian", "high-protein"], "calories": 520, "protein": 38, "carbs": 60, "fat": 12, "prep_time": 10, "cook_time": 15, "servings": 2,
     "ingredients": [{"name": "Oats", "amount": "1", "unit": "cup"}, {"name": "Eggs", "amount": "2", "unit": "whole"}, {"name": "Whey protein", "amount": "1", "unit": "scoop"}, {"name": "Banana", "amount": "1", "unit": "whole"}],
     "instructions": "Blend all ingredients until smooth.\nCook ladlefuls on a hot skillet for 2 minutes per side."},

    # Lunches
    {"name": "Grilled Chicken Quinoa Bowl", "description": "Chicken breast over quinoa with roasted vegetables.", "meal_types": ["lunch", "dinner"], "dietary_tags": ["gluten-free", "high-protein"], "calories": 620, "protein": 48, "carbs": 55, "fat": 18, "prep_time": 15, "cook_time": 25, "servings": 2,
     "ingredients": [{"name": "Chicken breast", "amount": "200", "unit": "g"}, {"name": "Quinoa", "amount": "0.5", "unit": "cup"}, {"name": "Bell pepper", "amount": "1", "unit": "whole"}, {"name": "Zucchini", "amount": "1", "unit": "whole"}, {"name": "Olive oil", "amount": "1", "unit": "tbsp"}],
     "instructions": "Cook quinoa according to package directions.\nGrill chicken for 6 minutes per side.\nRoast pepper and zucchini, then assemble the bowl."},
    {"name": "Turkey Avocado Wrap", "description": "Whole wheat wrap with turkey, avocado and greens.", "meal_types": ["lunch"], "dietary_tags": ["high-protein"], "calories": 540, "protein": 36, "carbs": 42, "fat": 24, "prep_time": 10, "cook_time": 0, "servings": 1,
     "ingredients": [{"name": "Whole wheat tortilla", "amount": "1", "unit": "whole"}, {"name": "Turkey breast", "amount": "120", "unit": "g"}, {"name": "Avocado", "amount": "0.5", "unit": "whole"}, {"name": "Lettuce", "amount": "1", "unit": "cup"}, {"name": "Tomato", "amount": "1", "unit": "whole"}],
     "instructions": "Layer turkey, avocado, lettuce and tomato on the tortilla.\nRoll tightly and slice in half."},
    {"name": "Lentil Vegetable Soup", "description": "Hearty red lentil soup with carrots and celery.", "meal_types": ["lunch", "dinner"], "dietary_tags": ["vegan", "vegetarian", "gluten-free"], "calories": 480, "protein": 26, "carbs": 72, "fat": 8, "prep_time": 15, "cook_time": 30, "servings": 4,
     "ingredients": [{"name": "Lentils", "amount": "1", "unit": "cup"}, {"name": "Carrot", "amount": "2", "unit": "whole"}, {"name": "Celery", "amount": "2", "unit": "stalk"}, {"name": "Onion", "amount": "1", "unit": "whole"}, {"name": "Garlic", "amount": "2", "unit": "clove"}, {"name": "Vegetable broth", "amount": "4", "unit": "cup"}],
     "instructions": "Saute onion, garlic, carrot and celery.\nAdd lentils and broth.\nSimmer for 25 minutes until lentils are soft."},
    {"name": "Tuna Chickpea Salad", "description": "Mediterranean salad with tuna, chickpeas and cucumber.", "meal_types": ["lunch"], "dietary_tags": ["gluten-free", "mediterranean"], "calories": 510, "protein": 40, "carbs": 38, "fat": 20, "prep_time": 10, "cook_time": 0, "servings": 1,
     "ingredients": [{"name": "Tuna", "amount": "1", "unit": "can"}, {"name": "Chickpeas", "amount": "0.5", "unit": "cup"}, {"name": "Cucumber", "amount": "1", "unit": "whole"}, {"name": "Tomato", "amount": "1", "unit": "whole"}, {"name": "Olive oil", "amount": "1", "unit": "tbsp"}, {"name": "Salt", "amount": "pinch", "unit": ""}],
     "instructions": "Chop cucumber and tomato.\nToss with tuna, chickpeas and olive oil.\nSeason with salt."},

    # Dinners
    {"name": "Baked Salmon with Asparagus", "description": "Lemon-garlic salmon fillet with roasted asparagus.", "meal_types": ["dinner"], "dietary_tags": ["gluten-free", "keto", "high-protein"], "calories": 640, "protein": 46, "carbs": 12, "fat": 42, "prep_time": 10, "cook_time": 20, "servings": 2,
     "ingredients": [{"name": "Salmon fillet", "amount": "200", "unit": "g"}, {"name": "Asparagus", "amount": "1", "unit": "bunch"}, {"name": "Garlic", "amount": "2", "unit": "clove"}, {"name": "Lemon", "amount": "1", "unit": "whole"}, {"name": "Olive oil", "amount": "1", "unit": "tbsp"}],
     "instructions": "Preheat the oven to 200C.\nArrange salmon and asparagus on a tray with garlic, lemon and oil.\nBake for 15-20 minutes."},
    {"name": "Beef and Broccoli Stir Fry", "description": "Lean beef strips with broccoli over brown rice.", "meal_types": ["dinner"], "dietary_tags": ["high-protein"], "calories": 680, "protein": 44, "carbs": 62, "fat": 24, "prep_time": 15, "cook_time": 15, "servings": 2,
     "ingredients": [{"name": "Beef sirloin", "amount": "200", "unit": "g"}, {"name": "Broccoli", "amount": "2", "unit": "cup"}, {"name": "Brown rice", "amount": "0.75", "unit": "cup"}, {"name": "Soy sauce", "amount": "2", "unit": "tbsp"}, {"name": "Garlic", "amount": "1", "unit": "clove"}],
     "instructions": "Cook rice.\nStir fry beef over high heat for 3 minutes.\nAdd broccoli, garlic and soy sauce; cook 4 more minutes."},
    {"name": "Tofu Vegetable Curry", "description": "Coconut curry with tofu, cauliflower and spinach.", "meal_types": ["dinner", "lunch"], "dietary_tags": ["vegan", "vegetarian", "gluten-free"], "calories": 590, "protein": 28, "carbs": 48, "fat": 30, "prep_time": 15, "cook_time": 25, "servings": 3,
     "ingredients": [{"name": "Tofu", "amount": "250", "unit": "g"}, {"name": "Cauliflower", "amount": "2", "unit": "cup"}, {"name": "Spinach", "amount": "2", "unit": "cup"}, {"name": "Coconut milk", "amount": "1", "unit": "can"}, {"name": "Curry paste", "amount": "2", "unit": "tbsp"}, {"name": "Basmati rice", "amount": "0.5", "unit": "cup"}],
     "instructions": "Brown cubed tofu.\nSimmer curry paste with coconut milk and cauliflower for 15 minutes.\nStir in tofu and spinach; serve over rice."},
    {"name": "Turkey Meatballs with Pasta", "description": "Whole wheat pasta with turkey meatballs in tomato sauce.", "meal_types": ["dinner"], "dietary_tags": ["high-protein"], "calories": 710, "protein": 50, "carbs": 78, "fat": 20, "prep_time": 20, "cook_time": 25, "servings": 4,
     "ingredients": [{"name": "Ground turkey", "amount": "400", "unit": "g"}, {"name": "Whole wheat pasta", "amount": "200", "unit": "g"}, {"name": "Tomato sauce", "amount": "2", "unit": "cup"}, {"name": "Onion", "amount": "1", "unit": "whole"}, {"name": "Parmesan cheese", "amount": "30", "unit": "g"}],
     "instructions": "Form turkey and minced onion into meatballs.\nBake for 18 minutes.\nToss with cooked pasta and sauce; top with parmesan."},

    # Snacks
    {"name": "Apple with Almond Butter", "description": "Sliced apple with a spoon of almond butter.", "meal_types": ["snack"], "dietary_tags": ["vegan", "vegetarian", "gluten-free"], "calories": 270, "protein": 7, "carbs": 30, "fat": 16, "prep_time": 2, "cook_time": 0, "servings": 1,
     "ingredients": [{"name": "Apple", "amount": "1", "unit": "whole"}, {"name": "Almond butter", "amount": "2", "unit": "tbsp"}],
     "instructions": "Slice the apple and serve with almond butter."},
    {"name": "Hummus and Veggie Sticks", "description": "Carrot and cucumber sticks with hummus.", "meal_types": ["snack"], "dietary_tags": ["vegan", "vegetarian", "gluten-free"], "calories": 240, "protein": 8, "carbs": 26, "fat": 12, "prep_time": 5, "cook_time": 0, "servings": 1,
     "ingredients": [{"name": "Hummus", "amount": "0.25", "unit": "cup"}, {"name": "Carrot", "amount": "1", "unit": "whole"}, {"name": "Cucumber", "amount": "0.5", "unit": "whole"}],
     "instructions": "Cut vegetables into sticks.\nServe with hummus."},
    {"name": "Cottage Cheese and Pineapple", "description": "High-protein cottage cheese with pineapple chunks.", "meal_types": ["snack", "breakfast"], "dietary_tags": ["vegetarian", "high-protein"], "calories": 220, "protein": 24, "carbs": 20, "fat": 4, "prep_time": 2, "cook_time": 0, "servings": 1,
     "ingredients": [{"name": "Cottage cheese", "amount": "1", "unit": "cup"}, {"name": "Pineapple", "amount": "0.5", "unit": "cup"}],
     "instructions": "Spoon cottage cheese into a bowl and top with pineapple."},
    {"name": "Pending Review Smoothie", "description": "Submitted recipe awaiting approval.", "meal_types": ["snack"], "dietary_tags": ["vegan"], "calories": 300, "protein": 10, "carbs": 50, "fat": 6, "prep_time": 5, "cook_time": 0, "servings": 1, "approved": False,
     "ingredients": [{"name": "Banana", "amount": "1", "unit": "whole"}, {"name": "Almond milk", "amount": "1", "unit": "cup"}],
     "instructions": "Blend until smooth."},
]
